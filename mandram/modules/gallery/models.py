# Supabase table: gallery_images
# This file documents the expected database schema

"""
Expected Supabase table structure:
- id: uuid (primary key)
- title: text (nullable)
- description: text (nullable)
- image_url: text (not null)
- event_id: uuid (nullable) - not validated against events
- category: text (nullable)
- display_order: integer (nullable) - nulls sort last
- show_in_gallery: boolean (default: true) - member of the general gallery
- pongal_images: boolean (default: false) - member of the Pongal carousel
- created_at: timestamp (default: now())
"""
