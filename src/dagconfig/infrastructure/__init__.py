"""Infrastructure layer — document I/O and graph views.

May import from domain. Must never import from services, commands, or output.
"""
