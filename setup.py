from setuptools import setup

NAME = "facturaec"

PACKAGE_DATA = {"facturaec": ["xsl/*.xsl"]}

setup(
    name=NAME,
    version="0.1.0",
    description="Normalización de comprobantes electrónicos del SRI (Ecuador)",
    package_dir={"": "src"},
    packages=["facturaec", "facturaec.commands"],
    package_data=PACKAGE_DATA,
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "lxml>=4.9",
        "openpyxl>=3.1",
    ],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["facturaec=facturaec.cli:main"]},
)
