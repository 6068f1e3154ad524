from setuptools import find_packages, setup

setup(
  name="isoalg",
  version="0.1.0",
  description="Finite fields, Montgomery curves and quaternion algebras for isogeny-based cryptography",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(exclude=["tests"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
  ],
  install_requires=[
    "gmpy2>=2.1",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit", "pynacl>=1.4", "cryptography>=35"],
    "dev": ["tox", "isort", "yapf"],
  },
)
