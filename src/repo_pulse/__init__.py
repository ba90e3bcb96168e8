"""Repo Pulse — GitHub repository dashboard for the terminal.

Fetches repository details, contributors, weekly commit activity and the
language breakdown from the GitHub REST API and shows them as cards,
tables and a sparkline.
"""

__version__ = "0.1.0"
