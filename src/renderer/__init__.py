# renderer/__init__.py
