from setuptools import find_packages, setup

setup(
    name='throttled-reader',
    version='0.1.0',
    packages=find_packages(exclude=["tests", "tests.*"]),
    license='MIT',
    description='Cap how many reads a poll loop may issue against a stream',
    python_requires=">=3.8",

    install_requires=[],
    extras_require={
        "test": ["pytest", "h11"]
    },
)
