from flask import current_app
from flask_restful import Resource, reqparse, inputs
from flask_jwt_extended import jwt_required, get_jwt_identity
from services.alert_functions import list_alerts, count_unread_alerts, mark_alert_read, mark_all_alerts_read, AlertNotFound

class WeatherAlerts(Resource):
    @jwt_required()
    def get(self):
        parser = reqparse.RequestParser()
        parser.add_argument('limit', type=inputs.positive, location='args', required=False,
                            help="limit must be a positive integer")
        parser.add_argument('unread', type=inputs.boolean, location='args', default=False)
        args = parser.parse_args()

        limit = args.get('limit') or current_app.config['ALERTS_PAGE_SIZE']
        limit = min(limit, current_app.config['ALERTS_MAX_PAGE_SIZE'])
        user_id = get_jwt_identity()
        alerts = list_alerts(user_id, limit=limit, unread_only=args['unread'])
        return {"status": "success", "data": [alert.to_dict() for alert in alerts]}, 200

class UnreadAlertCount(Resource):
    @jwt_required()
    def get(self):
        user_id = get_jwt_identity()
        return {"status": "success", "data": {"unread": count_unread_alerts(user_id)}}, 200

class MarkAlertRead(Resource):
    @jwt_required()
    def post(self, alert_id):
        user_id = get_jwt_identity()
        try:
            alert = mark_alert_read(user_id, alert_id)
        except AlertNotFound as e:
            return {"status": "error", "message": str(e)}, 404
        return {"status": "success", "data": alert.to_dict()}, 200

class MarkAllAlertsRead(Resource):
    @jwt_required()
    def post(self):
        user_id = get_jwt_identity()
        updated = mark_all_alerts_read(user_id)
        return {"status": "success", "message": f"Marked {updated} alerts as read."}, 200
