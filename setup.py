from setuptools import setup

setup(
    name="sdes",
    version="0.1.0",
    description="Simplified DES (S-DES) cipher with known-plaintext key search",
    license="MIT",
    packages=["src"],
    py_modules=["config"],
    install_requires=[
        "numpy",
        "scipy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "sdes-demo=src.main:main",
            "sdes-key-search=src.key_search:main",
        ]
    },
)
