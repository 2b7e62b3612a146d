"""Static payloads shared by the test modules. Copy before mutating."""

MAILCHIMP_EXCEPTION_MESSAGE = "MailChimp exception"

LIST_DATA = {
    "name": "New list",
    "permission_reminder": "You signed up for updates on Greeks economy.",
    "email_type_option": False,
    "contact": {
        "company": "Doe Ltd.",
        "address1": "DoeStreet 1",
        "address2": "",
        "city": "Doesy",
        "state": "Doedoe",
        "zip": "1672-12",
        "country": "US",
        "phone": "55533344412",
    },
    "campaign_defaults": {
        "from_name": "John Doe",
        "from_email": "john@doe.com",
        "subject": "My new campaign!",
        "language": "US",
    },
    "visibility": "prv",
    "use_archive_bar": False,
    "notify_on_subscribe": "notify@loyaltycorp.com.au",
    "notify_on_unsubscribe": "notify@loyaltycorp.com.au",
}

MEMBER_DATA = {
    "email_address": "urist.mcvankab+3@freddie.com",
    "email_type": "text",
    "status": "pending",
    "merge_fields": {"name": "field_name_1", "type": "text"},
    "language": "english",
    "vip": False,
    "location": {"latitude": 41.304566, "longitude": 69.244854},
    "marketing_permissions": [
        {"marketing_permission_id": "id", "text": "permission_text", "enabled": False},
    ],
    "ip_signup": "192.168.0.1",
    "timestamp_signup": "2018-11-01 00:00:00",
    "ip_opt": "192.168.0.1",
    "timestamp_opt": "2018-11-02 00:00:00",
    "tags": ["a tag", "another tag"],
}

NOT_REQUIRED = (
    "email_type", "merge_fields", "interests", "language", "vip", "location",
    "marketing_permissions", "ip_signup", "timestamp_signup", "ip_opt",
    "timestamp_opt", "tags",
)
