from setuptools import setup, find_packages

setup(
    name="sqrtdecomp",
    version="0.1.0",
    packages=find_packages(include=['sqrtdecomp', 'sqrtdecomp.*']),
    install_requires=[
        'numpy>=1.21.0',
        'pyyaml>=5.4.1',
        'matplotlib>=3.4.3',
        'pandas>=1.3.0',
        'seaborn>=0.11.2'
    ],
    extras_require={
        'test': ['pytest>=7.0']
    },
    description="Square-root decomposition structures for range sum and range add queries",
    python_requires='>=3.8',
)
