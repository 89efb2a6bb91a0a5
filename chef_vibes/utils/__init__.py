from .request_utils import parse_body, parse_object_id
from .results import delete_result, insert_result, update_result

__all__ = ['parse_body', 'parse_object_id', 'delete_result', 'insert_result', 'update_result']
