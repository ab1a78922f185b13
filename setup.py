from setuptools import setup, find_packages

setup(
    name='togglreport',
    version='0.1.0',
    description='A CLI tool for printing a per-day tag report of Toggl Track time entries.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'requests',
        'tabulate',
        'python-dotenv',
        'holidays',
        'tzdata',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'togglreport=togglreport.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        '': ['.env.example'],
    },
    python_requires='>=3.11',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
