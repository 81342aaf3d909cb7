# Supabase table: registrations
# Membership sign-ups from the contact form; written only, never read back by the site.

"""
Expected Supabase table structure:
- id: uuid (primary key)
- name: text (not null)
- email: text (not null)
- phone: text (nullable)
- reason: text (not null)
- message: text (nullable)
- registration_date: timestamp (default: now())
"""
