from setuptools import setup, find_packages

setup(
    name="AnyContainers",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[],
    python_requires=">=3.10",
    author="Charlie Angela Mehlenbeck",
    author_email="charlie_inventor2003@yahoo.com",
    description="A dict and a list that hold values of any, mutually different, types and hand them back as the type you ask for.",
	long_description=open("README.md").read(),
    license="MIT",
    keywords="heterogeneous containers type erasure",
)
