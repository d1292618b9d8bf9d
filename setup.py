import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("CHANGELOG.md", "r") as fh:
    long_description += fh.read()

setuptools.setup(
    name="stallsim",
    version="0.1.0",
    author="Jason Liu",
    author_email="jasonxliu2010@gmail.com",
    description="Cycle-stepped simulation of shared stalls with two mutually exclusive groups",
    license='MIT',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=['greenlet'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['stallsim=stallsim.cli:main']},
    python_requires='>=3.6',
)
