from __future__ import annotations

from html import escape

NOTES_SUBJECT = "Update on Your Training Consultation"


def build_notes_email(client_name: str, booking_time: str, notes: str, business_name: str) -> str:
    return f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #333;">Hi {escape(client_name)},</h2>
  <p>You have a new note regarding your consultation scheduled for:</p>
  <p style="background: #f5f5f5; padding: 15px; border-radius: 8px;">
    <strong>{escape(booking_time)}</strong>
  </p>
  <div style="background: #e8f5e9; padding: 20px; border-radius: 8px; margin: 20px 0;">
    <p style="margin: 0; color: #333;"><strong>Note from {escape(business_name)}:</strong></p>
    <p style="margin: 10px 0 0 0; color: #555;">{escape(notes)}</p>
  </div>
  <p>If you have any questions, feel free to reply to this email.</p>
  <p style="color: #888; font-size: 14px; margin-top: 30px;">- {escape(business_name)}</p>
</div>
""".strip()
