"""
API Routes - HTTP endpoint handlers

One router per area (matrix, device, state), all mounted under /api/v1.
"""
