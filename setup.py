"""setup.py for hex-fmt package."""
import subprocess

import setuptools


PACKAGE_NAME = 'hex_fmt'


# CUSTOM TEST COMMANDS


class PytestCommand(setuptools.Command):
    """Base class for setup.py commands which run pytest with some arguments."""

    user_options = []
    pytest_args = []

    def initialize_options(self):
        """Set default values for options."""
        pass

    def finalize_options(self):
        """Post-process options."""
        pass

    def run(self):
        """Run pytest."""
        subprocess.check_call(['pytest'] + self.pytest_args)


class TestCommand(PytestCommand):
    """setup.py command to run the whole test suite."""

    description = 'Test everything.'


class TestQuickCommand(PytestCommand):
    """setup.py command to run a quick test prioritizing unstaged changes."""

    description = 'Quick test for unstaged changes and previous failures.'
    pytest_args = [
        '-n', 'auto',
        '--picked=first',
        '--failed-first'
    ]


class TestDebugCommand(PytestCommand):
    """setup.py command to run a test and switch to pdb on the first failure."""

    description = 'Quick test for pdb on the first failure.'
    pytest_args = [
        '--failed-first',
        '--pdb', '-x'
    ]


class TestCoverageCommand(PytestCommand):
    """setup.py command to run a coverage reporting test."""

    description = 'Test with coverage reporting.'
    pytest_args = [
        '--cov={}'.format(PACKAGE_NAME),
        '--cov-branch',
        '--cov-report', 'term-missing:skip-covered',
        '--cov-report', 'html'
    ]


class TestCompleteCommand(PytestCommand):
    """setup.py command to run a complete reporting test."""

    description = 'Test with complete reporting.'
    pytest_args = [
        '--durations=0',
        '--cov={}'.format(PACKAGE_NAME),
        '--cov-branch',
        '--cov-report', 'term-missing',
        '--cov-report', 'html',
        '--hypothesis-show-statistics',
        '--verbose'
    ]


# MAIN SETUP

with open('README.md', 'r') as f:
    long_description = f.read()

setuptools.setup(
    name='hex-fmt',
    version='0.1.0',
    description='Formatting and shortening of byte sequences as hexadecimal strings.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.6',
    install_requires=[],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
            'pytest-cov',
            'pytest-xdist',
            'pytest-picked'
        ]
    },
    cmdclass={
        'test': TestCommand,
        'test_quick': TestQuickCommand,
        'test_debug': TestDebugCommand,
        'test_coverage': TestCoverageCommand,
        'test_complete': TestCompleteCommand
    }
)
