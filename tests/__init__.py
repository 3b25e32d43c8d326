"""
Only the root tests directory carries an __init__.py.

It makes pytest treat tests/ as a package so test modules with equal names in
different subdirectories do not clash. Subdirectories work as namespace
packages (PEP 420) and stay without __init__.py files.
"""
