"""Install the user accounts service."""

from setuptools import setup, find_packages

setup(
    name='user-accounts',
    version='0.1.0',
    packages=find_packages(exclude=['*tests*']),
    package_data={'useraccounts': ['config.py']},
    entry_points={
        'console_scripts': ['useraccounts=useraccounts.cli:cli']
    },
    install_requires=[
        "flask",
        "flask-sqlalchemy",
        "sqlalchemy",
        "werkzeug",
        "wtforms",
        "email-validator",
        "bcrypt",
        "pytz",
        "python-json-logger",
        "click"
    ],
    extras_require={
        'test': ["pytest", "mimesis"]
    },
    zip_safe=False
)
