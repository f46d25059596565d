from setuptools import setup, find_packages

setup(
    name="chatbox-engine",  # Package name
    version="0.1.0",  # Version number
    description="Chat session engine for an in-page coding problem assistant.",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["chatbox", "chatbox.*"]),
    include_package_data=True,  # Include non-Python files
    package_data={
        "chatbox": ["prompts/*.md"],  # The system prompt template
    },
    install_requires=[
        "openai>=1.0.0",
        "requests>=2.25.0",
        "python-dotenv",
        "pydantic>=2.0",
        "beautifulsoup4>=4.9",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
