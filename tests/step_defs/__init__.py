"""Step definitions package for BDD tests.

Modules are grouped by what the steps drive: workspace setup, the audit
engine, single expressions and the command line. Every *_steps.py module is
registered as a pytest plugin in the root conftest.py.
"""
