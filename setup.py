import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    if not os.path.exists(README):
        return ""
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="protoc-gen-microweb",
    version="1.0.1",
    description="protoc plugin generating chi HTTP handlers and jsonpb adapters for go-micro services",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Intended Audience :: Developers",
    ],
    keywords="protobuf protoc plugin code generation go micro http chi",
    packages=find_packages(),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
        "protobuf>=4.21.0",
        "googleapis-common-protos>=1.56.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "protoc-gen-microweb=protoc_gen_microweb.protoc_gen_microweb:protoc_gen_microweb",
        ],
    },
    include_package_data=True,
    package_data={
        "protoc_gen_microweb": ["templates/**/*.jinja2", "templates/go/*.jinja2"],
    },
    zip_safe=False,
)
