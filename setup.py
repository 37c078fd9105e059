import setuptools

with open("README.md", "r", encoding="utf-8") as f:
  long_description = f.read()

setuptools.setup(
  name="ndlayout",
  version="0.0.1",
  author="borgwang",
  author_email="badbobobo@gamil.com",
  description="Shape, strides and broadcasting core for N-dimensional arrays",
  long_description=long_description,
  long_description_content_type="text/markdown",
  url="https://github.com/borgwang/ndlayout",
  packages=setuptools.find_packages(exclude=("test",)),
  classifiers=[
      "Programming Language :: Python :: 3",
      "License :: OSI Approved :: MIT License",
  ],
  install_requires=["numpy"],
  python_requires=">=3.8",
  extras_require={
    "linting": ["flake8", "pylint", "mypy", "pre-commit"],
    "testing": ["pytest"],
  }
)
