"""
OTP email rendering.

Decision: Using Jinja2 templates for email content keeps the wording out of
the sending logic. Both an HTML and a plain-text body are rendered for
clients without rich rendering.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from otp_delivery.domain.delivery import (
    OTP_EMAIL_SUBJECT,
    OTP_VALIDITY_MINUTES,
    DeliveryRequest,
    OtpEmail,
)

TEMPLATES_DIR = Path(__file__).parent / "templates"


class JinjaOtpMessageBuilder:
    """Renders `otp_code.html` and `otp_code.txt` into an OtpEmail."""

    def __init__(
        self,
        system_name: str = "Sentinel Healthcare System",
        templates_dir: Path = TEMPLATES_DIR,
    ):
        self.system_name = system_name
        # Escape the HTML body only, a display name must not inject markup
        self.jinja_env = Environment(
            loader=FileSystemLoader(templates_dir),
            autoescape=select_autoescape(enabled_extensions=("html",)),
            keep_trailing_newline=True,
        )

    def build(self, request: DeliveryRequest) -> OtpEmail:
        context = {
            "recipient_label": request.recipient_label,
            "code": request.code,
            "validity_minutes": OTP_VALIDITY_MINUTES,
            "system_name": self.system_name,
        }

        html_body = self.jinja_env.get_template("otp_code.html").render(context)
        text_body = self.jinja_env.get_template("otp_code.txt").render(context)

        return OtpEmail(
            destination=request.destination,
            subject=OTP_EMAIL_SUBJECT,
            html_body=html_body,
            text_body=text_body,
        )
