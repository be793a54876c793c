class InternalURIs:
    TRANSCRIPT = "/transcript"
    UPLOAD = TRANSCRIPT + "/upload"
    AI = TRANSCRIPT + "/ai"
    GENERATE_DESCRIPTION = AI + "/generate/description"
    ASK = AI + "/ask"
    HEALTH = "/healthz"
