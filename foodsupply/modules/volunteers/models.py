# MongoDB collection: volunteers
# Volunteer sign-ups are free-form: the submitted object is stored as-is.

VOLUNTEERS_COLLECTION = "volunteers"
