from setuptools import setup, find_packages

setup(
    name="lambdadepot",
    version="1.0.0",
    description="Fixed-arity function types, a tri-state Result and null-safe accessors",
    author="lambdadepot Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "jsonschema>=4.0.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.2.5",
            "black>=21.6b0",
            "isort>=5.9.2",
            "mypy>=0.910",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.8",
)
