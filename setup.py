# setup.py
from setuptools import setup, find_packages

setup(
    name="html_grader",
    version="0.1.0",
    description="Проверка HTML-страниц по списку CSS-селекторов с выводом в JSON",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "soupsieve>=2.5",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "html-grader=html_grader.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
