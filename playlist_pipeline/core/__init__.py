"""
Core services for the playlist analysis pipeline
"""
