"""Social network of users and friendships with graph queries, a text file format, an interactive menu and grid searches."""

__version__ = "0.1.0"