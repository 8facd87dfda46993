"""Intake submission flow: one relay POST mapped onto the submission state."""
from typing import Optional

from homecare_site.providers.form_relay import FormRelayProvider
from homecare_site.schemas import (
    ErrorState,
    IdleState,
    IntakeFields,
    SendingState,
    SubmissionState,
    SuccessState,
)
from homecare_site.utils.logging_config import logger


class IntakeSession:
    """Submission state and form values for one rendering session."""

    def __init__(
        self,
        relay: FormRelayProvider,
        subject: str,
        fields: Optional[IntakeFields] = None,
    ) -> None:
        self.relay = relay
        self.subject = subject
        self.fields = fields or IntakeFields()
        self.state: SubmissionState = IdleState()

    @property
    def is_sending(self) -> bool:
        return isinstance(self.state, SendingState)

    def update(self, **values: str) -> None:
        """Apply user edits to the form values."""
        self.fields = IntakeFields(**{**self.fields.model_dump(), **values})

    def payload(self) -> dict:
        return {
            "_subject": self.subject,
            "name": self.fields.name,
            "phone": self.fields.phone,
            "email": self.fields.email,
            "message": self.fields.message,
        }

    async def submit(self) -> SubmissionState:
        """
        Send the current form values once. Assumes name and phone are
        present. While a previous submission is pending this is a no-op,
        like the disabled submit button.
        """
        if self.is_sending:
            return self.state
        # Set before the request goes out so the pending state is never missed.
        self.state = SendingState()
        result = await self.relay.submit(self.payload())

        if result["status"] != "success":
            self.state = ErrorState(message=result["error"])
            logger.debug("Intake submission failed status_code=%s", result["status_code"])
            return self.state

        self.fields = IntakeFields()
        self.state = SuccessState()
        logger.info("Intake submission accepted status_code=%s", result["status_code"])
        return self.state
