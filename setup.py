# Non-interactive setup.py for packaging
#
# Runtime requirements are read from requirements.txt; the `skinmod` console
# script is installed from skinmod.cli.

from pathlib import Path
from setuptools import setup, find_packages


def _read_requirements():
    req_file = Path(__file__).parent / "requirements.txt"
    if not req_file.exists():
        return []
    lines = req_file.read_text(encoding="utf-8").splitlines()
    reqs = [ln.strip() for ln in lines if ln.strip() and not ln.strip().startswith("#")]
    return reqs


long_description = ""
readme_path = Path(__file__).parent / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")


setup(
    name="skinmod",
    version="0.1.0",
    description="Mod folder state handling and key swap ini parsing for skin mod managers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "docs", "artifacts")),
    include_package_data=True,
    install_requires=_read_requirements(),
    extras_require={
        "test": ["pytest>=7"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "skinmod = skinmod.cli:main",
        ]
    },
)
