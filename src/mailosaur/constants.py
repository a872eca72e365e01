"""Default configuration constants for the Mailosaur client."""

# Service endpoints
SERVICE_URL = "https://mailosaur.com/api"
SMTP_HOST = "mailosaur.io"

# HTTP settings (milliseconds)
DEFAULT_TIMEOUT_MS = 30_000

# Environment variables read by MailosaurClient.from_env
ENV_API_KEY = "MAILOSAUR_API_KEY"
ENV_SERVER_ID = "MAILOSAUR_SERVER_ID"
ENV_BASE_URL = "MAILOSAUR_BASE_URL"

# Length of the random local part used by generate_email_address
GENERATED_LOCAL_PART_LENGTH = 10
