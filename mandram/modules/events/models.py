# Supabase table: events
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- title: text (not null)
- description: text (nullable)
- date: timestamptz (not null)
- location: text (nullable)
- image_url: text (nullable)
- category: text (nullable) - e.g. Workshop, Competition, Festival
- is_featured: boolean (default: false)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

"Upcoming" and "past" are derived at query time from date vs. now, never stored.
"""
