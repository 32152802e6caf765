"""
Core Package.

Contains the syntax tree machinery:
- Node model and metadata
- Node Factory
- Tree walking, cloning and parent linking
- Parser adapter and code generator
"""
