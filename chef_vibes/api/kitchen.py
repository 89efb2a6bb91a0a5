from flask import jsonify, request
from flask_jwt_extended import jwt_required

from . import kitchen_bp
from ..models import KitchenEntryCreate
from ..services import KitchenService
from ..utils import parse_body


@kitchen_bp.route('/cart', methods=['GET'])
@jwt_required()
def get_cart():
    email = request.args.get('email')
    return jsonify(KitchenService.list_entries(email)), 200


@kitchen_bp.route('/add-to-kitchen', methods=['POST'])
@jwt_required()
def add_to_kitchen():
    """Save a recipe for a user; saving the same recipe twice is a no-op"""
    entry = parse_body(KitchenEntryCreate)
    return jsonify(KitchenService.add_entry(entry)), 200


# Unauthenticated, unlike the other mutating routes
@kitchen_bp.route('/cart/<entry_id>', methods=['DELETE'])
def remove_from_cart(entry_id):
    return jsonify(KitchenService.delete_entry(entry_id)), 200
