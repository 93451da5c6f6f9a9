"""
DocMorph REST API.
"""
