from setuptools import setup, find_packages

version: dict[str, str] = {}
with open("utau_lyrics/_version.py", encoding="utf-8") as f:
    exec(f.read(), version)

setup(
    name="utau-lyrics",
    version=version["__version__"],
    description="Client for the Utau lyrics API with strict response validation",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"utau_lyrics": ["py.typed"]},
    install_requires=[
        "pydantic>=2.5",
        "requests",
    ],
    extras_require={
        "dev": [
            "pytest",
            "black",
            "ruff",
            "mypy",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Sound/Audio",
        "Topic :: Software Development :: Libraries",
    ],
    keywords="lyrics utau api client synchronized",
)
