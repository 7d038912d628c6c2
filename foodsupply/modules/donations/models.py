# MongoDB collection: donations
# Donations are free-form: the submitted object is stored as-is.
# Documents gain an _id (ObjectId) on insert; nothing else is guaranteed.

DONATIONS_COLLECTION = "donations"
