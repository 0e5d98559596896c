# uvws/core/__init__.py
"""Resolution pipeline, merge helpers and output writers."""
