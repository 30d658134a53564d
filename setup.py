import re
from pathlib import Path
from typing import IO

from setuptools import setup

ROOT_FOLDER = Path(__file__).parent.absolute()
REQUIREMENTS_FOLDER = ROOT_FOLDER / "requirements"
VERSION_PATTERN = re.compile(r'^__version__\s*=\s*__VERSION__\s*=\s*[\'"]([^\'"]*)[\'"]', re.MULTILINE)


def read_version() -> str:
    with open(ROOT_FOLDER / "automata" / "__version__.py", encoding="utf-8") as fp:
        return VERSION_PATTERN.search(fp.read())[1]


def get_requirements(fp: IO) -> list[str]:
    return [line.strip() for line in fp.read().splitlines() if line.strip() and not line.strip().startswith("#")]


def read_extras() -> dict[str, list[str]]:
    extras = {}
    for file in sorted(REQUIREMENTS_FOLDER.glob("extra-*.txt")):
        with file.open(encoding="utf-8") as fp:
            extras[file.stem[len("extra-") :]] = get_requirements(fp)
    # every optional requirement, for working on the library itself
    extras["dev"] = sorted({req for reqs in extras.values() for req in reqs})
    return extras


with open(REQUIREMENTS_FOLDER / "base.txt", encoding="utf-8") as fp:
    install_requires = get_requirements(fp)

# Metadata and options defined in setup.cfg
setup(version=read_version(), install_requires=install_requires, extras_require=read_extras())
