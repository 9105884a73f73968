"""
Web dashboard for issueboard.

A FastAPI app that serves the board page and a small JSON API over
the board view model.
"""
