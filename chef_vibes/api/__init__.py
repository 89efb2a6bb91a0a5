from flask import Blueprint

# Route blueprints, all mounted at the site root
auth_bp = Blueprint('auth', __name__)
category_bp = Blueprint('category', __name__)
recipe_bp = Blueprint('recipe', __name__)
kitchen_bp = Blueprint('kitchen', __name__)
# Import routes to register them with the blueprints
from . import auth
from . import categories
from . import recipes
from . import kitchen
