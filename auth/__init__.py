"""
auth — User authentication module.

Provides:
  • Password hashing (bcrypt, fixed work factor)
  • JWT bearer token creation & verification
  • ``AuthService`` with the login / register flows
  • Login, user-creation and current-user API routes
  • ``get_current_user_id`` FastAPI dependency
"""
