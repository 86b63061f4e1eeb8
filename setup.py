from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="advanced-slicing",
    version="1.0.0",
    description="Index and slice any iterable, including positions counted from the end of iterators which can only be read once.",
    packages=[
        "advanced_slicing",
        "advanced_slicing._src",
        "advanced_slicing.queue",
        "advanced_slicing.queue._src",
    ],
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest"],
    },
    long_description = long_description,
    long_description_content_type = "text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
