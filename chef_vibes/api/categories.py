from flask import jsonify

from . import category_bp
from ..services import CategoryService


@category_bp.route('/categories', methods=['GET'])
def get_categories():
    return jsonify(CategoryService.list_categories()), 200


@category_bp.route('/recipie/<category>', methods=['GET'])
def get_recipes_by_category(category):
    """Category details plus every recipe in it, matched case-insensitively"""
    return jsonify(CategoryService.lookup(category)), 200
