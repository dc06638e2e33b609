# File: html_grader/__main__.py
from html_grader.cli import cli

if __name__ == "__main__":
    cli()
