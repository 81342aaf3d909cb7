# Supabase table: keepalive
# Single-row marker touched on a schedule so the hosted project is not paused for inactivity.

"""
Expected Supabase table structure:
- id: integer (primary key) - always 1
- last_ping: timestamptz (not null)
"""
