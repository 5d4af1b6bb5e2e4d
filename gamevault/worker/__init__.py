"""
Background worker: consumes the SQS task queue.
"""
