"""
ghclone: interactively clone repositories of a GitHub account.

Lists the repositories owned by an account, lets the user pick some of
them and clones each with the git command-line client.
"""

__version__ = "1.0.0"
__author__ = "ghclone contributors"
