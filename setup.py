from setuptools import setup

with open("countdown/version.py") as f:
    exec(f.read())

tests_require = ["pytest", "pytest-asyncio", "pytest-mock"]

setup(
    name="python-countdown",
    version=__version__,  # type: ignore # noqa: F821
    description="Terminal countdown timer with pause and resume",
    url="https://github.com/python-countdown/python-countdown",
    author="",
    author_email="",
    license="GPLv3",
    packages=["countdown", "countdown.cli"],
    install_requires=["asyncclick>=8.1.7", "async-timeout>=4.0", "mashumaro", "rich"],
    extras_require={"test": tests_require},
    python_requires=">=3.9",
    entry_points={"console_scripts": ["countdown=countdown.cli.main:cli"]},
    zip_safe=False,
)
