from setuptools import setup, find_packages
import re

# Read version from takehome/__init__.py
with open('takehome/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='take-home',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'takehome': ['tax_rules/*.yaml'],
    },
    include_package_data=True,
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'take-home=takehome.cli.__main__:main',
            'take-home-mcp=takehome.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Take-home pay estimates across federal, state, city, and payroll taxes.',
    python_requires='>=3.10',
)
