"""
Media service — static constants.
"""

# Presigned GET URL lifetime
SIGNED_URL_EXPIRY_SECONDS = 3600  # 1 hour

# Avatar output
AVATAR_KEY_PREFIX = "avatar"
AVATAR_WIDTH = 200
AVATAR_EXTENSION = "webp"
AVATAR_CONTENT_TYPE = "image/webp"
WEBP_QUALITY = 80

# Largest inbound RPC message, sized for image uploads
MAX_MESSAGE_BYTES = 20 * 1024 * 1024  # 20 MB

HEALTHY_MESSAGE = "Media microservice is healthy"
IMAGE_DELETED_MESSAGE = "Image deleted successfully"
