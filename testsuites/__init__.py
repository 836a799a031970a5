"""
Test suites package.

Holds the page object framework (`testsuites.ui_testing.framework`), the page
objects built on it and the unit / UI test suites. Kept importable so runners
and IDEs can navigate it.
"""
