from setuptools import setup, find_packages

setup(
    name="bigrational",
    version="1.0",
    url="https://github.com/klamt-lab/bigrational.git",
    description="Exact arbitrary-precision rational numbers with fixed and IEEE-like floating semantics",
    long_description=("Exact arbitrary-precision rational numbers in lowest terms, in a fixed variant where division "
                      "by zero is an error and a floating variant with NaN and signed infinities. Includes exact "
                      "IEEE-754 and decimal conversion, rounding modes, gcd/lcm/mediant and continued fractions"),
    long_description_content_type="text/plain",
    author="Philipp Schneider",
    author_email="zgddtgt@gmail.com",
    license="Apache License 2.0",
    python_requires=">=3.9",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={
        "test": ["pytest", "pytest-timeout"],
    },
    project_urls={
        "Bug Reports": "https://github.com/klamt-lab/bigrational/issues",
        "Source": "https://github.com/klamt-lab/bigrational/",
    },
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["rational", "fraction", "exact arithmetic", "continued fraction", "IEEE-754"],
    zip_safe=False,
)
