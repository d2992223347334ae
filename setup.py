from setuptools import setup

# install with: pip install -e .

setup(
    name='wordle-engine',
    version='0.1.0',
    python_requires='>=3.8',
    packages=['wordle_engine'],
    package_data={
        'wordle_engine': ['words5.txt'],
    },
    install_requires=[
        'click',
        'rich',
        'blinker',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'wordle = wordle_engine.wordleui:cli',
        ],
    },
)
