"""Work Tracker earnings package.

Organized by feature modules (earnings, entries, projects, imports, reports)
around a pure earnings calculator. Web controllers and storage live outside
this package and reach it through services and repository protocols.
"""

__version__ = "0.1.0"
