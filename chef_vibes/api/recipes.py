import logging

from flask import jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from . import recipe_bp
from ..models import RecipeCreate, RecipeUpdate
from ..services import RecipeService
from ..utils import parse_body

logger = logging.getLogger(__name__)


@recipe_bp.route('/recipies', methods=['GET'])
@jwt_required()
def get_recipes():
    return jsonify(RecipeService.list_recipes()), 200


@recipe_bp.route('/recipies/<recipe_id>', methods=['GET'])
def get_recipe(recipe_id):
    # An unknown id answers with null, not 404
    return jsonify(RecipeService.get_recipe(recipe_id)), 200


@recipe_bp.route('/recipie', methods=['POST'])
def create_recipe():
    recipe = parse_body(RecipeCreate)
    return jsonify(RecipeService.create_recipe(recipe)), 200


@recipe_bp.route('/recipie/<recipe_id>', methods=['PUT'])
@jwt_required()
def update_recipe(recipe_id):
    changes = parse_body(RecipeUpdate)
    result = RecipeService.upsert_recipe(recipe_id, changes)
    logger.info(f"Recipe {recipe_id} updated by {get_jwt_identity()}")
    return jsonify(result), 200


@recipe_bp.route('/recipie/<recipe_id>', methods=['DELETE'])
@jwt_required()
def delete_recipe(recipe_id):
    result = RecipeService.delete_recipe(recipe_id)
    logger.info(f"Recipe {recipe_id} deleted by {get_jwt_identity()}")
    return jsonify(result), 200
