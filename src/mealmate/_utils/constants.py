ENV_BASE_URL = "MEALMATE_API_URL"
ENV_INGREDIENT_DETECTION_URL = "MEALMATE_INGREDIENT_DETECTION_URL"
ENV_TIMEOUT = "MEALMATE_TIMEOUT"
ENV_ID_TOKEN = "MEALMATE_ID_TOKEN"

DEFAULT_BASE_URL = "http://localhost:5000/api"
DEFAULT_INGREDIENT_DETECTION_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 30.0

INGREDIENT_DETECTION_ENDPOINT = "/detect"

HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

CONTENT_TYPE_JSON = "application/json"

USER_AGENT = "MealMate.Python.Client"
