"""Backend Integration Package.

- client: Supabase client factory, with demo mode when credentials are missing.
"""
