"""
Infrastructure Layer

Cache backends and the monitoring that observes them.
"""
