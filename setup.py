from setuptools import setup, find_packages

setup(
    name="sentence-compiler",
    version="0.1.0",
    description="sentc v0.1 — lexer, recursive-descent parser and AST builder for simple English-like sentences",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="sentc Project",
    python_requires=">=3.9",
    packages=find_packages(),
    entry_points={
        "console_scripts": [
            "sentc=sentence_compiler.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Compilers",
        "Topic :: Text Processing :: Linguistic",
    ],
)
