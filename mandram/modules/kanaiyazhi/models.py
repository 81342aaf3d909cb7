# Supabase table: kanaiyazhi_editions
# Kanaiyazhi is the association's student literary magazine.

"""
Expected Supabase table structure:
- id: uuid (primary key)
- edition_number: integer (not null)
- title: text (not null)
- subtitle: text (nullable)
- description: text (nullable)
- year: integer (not null)
- month: text (nullable)
- cover_image_url: text (not null)
- pdf_url: text (not null)
- page_count: integer (nullable)
- is_featured: boolean (default: false)
- display_order: integer (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""
