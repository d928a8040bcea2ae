"""
Infrastructure layer for tenview: NumPy-backed ranges, spans, views and
containers.
"""
