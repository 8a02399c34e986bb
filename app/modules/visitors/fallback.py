"""Fixed roster returned when the Slack directory cannot be reached."""

from modules.visitors.models import DirectoryProfile, DirectoryUser

FALLBACK_EMAIL_DOMAIN = "growthjockey.com"


def _user(user_id: str, handle: str, real_name: str) -> DirectoryUser:
    return DirectoryUser(
        id=user_id,
        name=handle,
        real_name=real_name,
        profile=DirectoryProfile(email=f"{handle}@{FALLBACK_EMAIL_DOMAIN}"),
    )


FALLBACK_USERS = (
    _user("U123456", "john.doe", "John Doe"),
    _user("U234567", "jane.smith", "Jane Smith"),
    _user("U345678", "mike.johnson", "Mike Johnson"),
    _user("U456789", "sarah.wilson", "Sarah Wilson"),
    _user("U567890", "david.brown", "David Brown"),
    _user("U678901", "lisa.davis", "Lisa Davis"),
    _user("U789012", "tom.miller", "Tom Miller"),
    _user("U890123", "amy.garcia", "Amy Garcia"),
    _user("U901234", "robert.lee", "Robert Lee"),
    _user("U012345", "emily.chen", "Emily Chen"),
)
