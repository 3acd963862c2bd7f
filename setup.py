from setuptools import setup, find_packages

setup(
    name="orchestrator-submit",
    version="1.0.0",
    description="Submit work orders to an Orchestrator workflow server",
    author="Dimitar Navushtanov",
    author_email="dimitar.navushtanov@fadata.eu",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"orchestrator_submit.configs": ["config.yml"]},
    install_requires=[
        "requests",
        "typer",
        "pydantic>=2",
        "python-dotenv",
        "pyyaml",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "orchestrator-submit=orchestrator_submit.cli.main:main",
        ],
    },
    python_requires=">=3.8",
)
