import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r") as fh:
    requirements = fh.readlines()

setuptools.setup(
    name="tenet",
    version="0.0.1",
    description="A compiler from tensor network diagrams to NumPy code",
    long_description=long_description,
    long_description_content_type="text/markdown",
    project_urls={},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "."},
    packages=setuptools.find_packages(where=".", include=["tenet", "tenet.*"]),
    install_requires=[req for req in requirements if req[:2] != "# "],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.6",
)
