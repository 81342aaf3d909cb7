# Supabase table: team_members
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- name: text (not null)
- role: text (not null) - e.g. President, Events Head
- position_order: integer (nullable) - explicit ordering, nulls sort last
- image_url: text (nullable)
- bio: text (nullable)
- email: text (nullable)
- linkedin_url: text (nullable)
- is_office_bearer: boolean (default: false)
- is_faculty: boolean (default: false)
- year: integer (nullable) - tenure year the member served in
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

Office bearers: is_office_bearer = true
Core committee: is_office_bearer = false and is_faculty = false
Faculty coordinators: is_faculty = true
"""
