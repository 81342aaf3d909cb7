# Supabase table: achievements
# This file documents the expected database schema

"""
Expected Supabase table structure:
- id: uuid (primary key)
- title: text (not null)
- description: text (nullable)
- year: integer (not null)
- category: text (nullable)
- image_url: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""
