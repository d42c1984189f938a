# file: services/mail_templates.py

from html import escape
from typing import Any, Tuple

LOGO_URL = (
    "https://firebasestorage.googleapis.com/v0/b/tp-clinica-online-5cb54.appspot.com/o/logo.jpeg"
    "?alt=media&token=d3b33426-153e-46b2-b521-9f6cf8e10b2f"
)

ACCEPTED_SUBJECT = "Felicitaciones su cuenta fue aceptada"
PENDING_SUBJECT = "Su cuenta está pendiente de aprobación"
REJECTED_SUBJECT = "Notificacion de rechazo"

_LAYOUT = """
<div style="background-color: #f9f9f9; padding: 20px; font-family: 'Roboto', Arial, sans-serif;">
  <link href="https://fonts.googleapis.com/css2?family=Roboto:wght@400;700&display=swap" rel="stylesheet">
  <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border: 1px solid #dddddd; padding: 20px; border-radius: 8px; text-align: center;">
    <img src="{logo}" alt="Logo Sabor Académico" style="width: 100px; margin-bottom: 20px;">
    <h1 style="color: {color};">{heading}</h1>
    {paragraphs}
    <hr style="border: none; border-top: 1px solid #eeeeee; margin: 20px 0;">
    {closing}
  </div>
</div>
"""


def _display_name(user_name: Any) -> str:
    return escape("" if user_name is None else str(user_name))


def _render(color: str, heading: str, paragraphs: str, closing: str) -> str:
    return _LAYOUT.format(logo=LOGO_URL, color=color, heading=heading, paragraphs=paragraphs, closing=closing)


def render_status_mail(accepted: Any, user_name: Any) -> Tuple[str, str]:
    """Returns (subject, html) for the accepted or pending-approval mail."""
    name = _display_name(user_name)
    if bool(accepted):
        return ACCEPTED_SUBJECT, _render(
            "#4CAF50",
            f"¡Felicitaciones! {name}",
            '<p style="font-size: 18px; color: #333333;">Su cuenta ha sido <strong>aceptada</strong>.</p>\n'
            '    <p style="font-size: 16px; color: #666666;">'
            "¡Estamos emocionados de que comiences a usar nuestra plataforma!</p>",
            '<p style="font-size: 16px; color: #333333;">Saludos, <br> <strong>Sabor Académico</strong></p>',
        )
    return PENDING_SUBJECT, _render(
        "#FFA726",
        f"¡Cuenta creada! {name}",
        '<p style="font-size: 18px; color: #333333;">'
        "Su cuenta ha sido creada y está <strong>pendiente de aprobación</strong>.</p>\n"
        '    <p style="font-size: 16px; color: #666666;">'
        "Recibirá un aviso por correo electrónico una vez que se apruebe su cuenta.</p>",
        '<p style="font-size: 16px; color: #333333;">Saludos, <br> <strong>Sabor Académico</strong></p>',
    )


def render_rejection_mail(user_name: Any) -> Tuple[str, str]:
    """Returns (subject, html) for the rejection mail."""
    name = _display_name(user_name)
    return REJECTED_SUBJECT, _render(
        "#E53935",
        f"Lo sentimos, {name}",
        '<p style="font-size: 18px; color: #333333;">'
        "Lamentablemente, su cuenta no ha sido <strong>aprobada</strong>.</p>\n"
        '    <p style="font-size: 16px; color: #666666;">'
        "Tras revisar la información proporcionada, hemos determinado que no cumple con los requisitos "
        "necesarios para ser parte de nuestra plataforma en este momento.</p>",
        '<p style="font-size: 16px; color: #333333;">'
        "Si tiene alguna pregunta o desea obtener más información, no dude en ponerse en contacto con nosotros.</p>\n"
        '    <p style="font-size: 16px; color: #333333;">Saludos cordiales, <br> <strong>Sabor Académico</strong></p>',
    )
