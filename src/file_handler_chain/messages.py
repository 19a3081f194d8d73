# ==========================
# Module: messages
# Purpose: User-facing message templates shared by the file handlers and service.
# ==========================

NO_HANDLERS_AVAILABLE = "No handlers available."
NO_HANDLER_FOUND = "No handler found for file: "
PROCESSING_COMPLETE = "Processing complete for file: "
OPEN_FILE = "Opening %s file: %s"
