"""
API Middleware - request/response processing

error_handler maps exceptions to standard JSON error bodies.
"""
