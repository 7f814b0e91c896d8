"""Christoffel's Menu: a Textual app for curating a restaurant menu."""
