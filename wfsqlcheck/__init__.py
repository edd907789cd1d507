"""
wfsqlcheck
==========

Validate serverless-workflow JSON embedded in changed SQL migrations.

These modules are intended to be used together via the CLI entry point:

- :mod:`wfsqlcheck.cli`

The pieces can also be driven directly:

- :mod:`wfsqlcheck.git` lists the files changed between two branches
- :mod:`wfsqlcheck.scanning` filters, detects and extracts JSON literals
- :mod:`wfsqlcheck.validation` checks payloads against the workflow schema
- :mod:`wfsqlcheck.pipeline` threads the results through one run
- :mod:`wfsqlcheck.results` writes ``suggestions.json``
"""

__version__ = "0.1.0"
