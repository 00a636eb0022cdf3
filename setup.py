from setuptools import find_packages, setup

setup(
    name='decorateanything',
    version='2.0.0',
    packages=find_packages(include=['decorateanything']),
    python_requires='>=3.12',
    license='bsd',
    description='Python 3.12+ decorator base class that forwards to any wrapped object',
    extras_require={
        'base': (base := ['annotated-types']),
        'requirements': (requirements := base),
        'test': (test := requirements + ['pytest', 'pytest-asyncio', 'pytest-cov']),
    },
    install_requires=base,
)
