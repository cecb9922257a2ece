"""
FastAPI application exposing the movie and score services.
"""
