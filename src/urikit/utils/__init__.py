"""src/urikit/utils/__init__.py"""
