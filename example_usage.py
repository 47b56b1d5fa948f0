# example_usage.py
import logging

from form_schema import Form, to_markdown_card
from form_schema.example import EXAMPLE_VALIDATORS

# Standard Python logging for script-level messages
logging.basicConfig(
    level="INFO",
    format="%(asctime)s %(levelname)s %(message)s",
)
log = logging.getLogger("form_schema.examples")

# 1) load the bundled sign-up form and wire in its named validators
form = Form.load("user_schema.json", validators=EXAMPLE_VALIDATORS)
log.info("Form: %s (v%s)", form.title, form.version)

# 2) validate a submission; every violation is collected
submission = {
    "personal": {"firstName": "A", "lastName": "Smith", "email": "alice@gmail.com"},
    "account": {"password": "P@ssw0rd1", "confirmPassword": "P@ssw0rd!", "role": "admin"},
    "roleSpecific": {"level": 0},
}
result = form.validate_sync(submission)
log.info("valid=%s, %d error(s)", result.valid, len(result.errors))

# 3) render a report
print(to_markdown_card(result, title=form.title))
