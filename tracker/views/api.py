from flask import Blueprint, jsonify

from tracker.services.analytics_service import AnalyticsService

api_bp = Blueprint('api', __name__, url_prefix='/api/analytics')


@api_bp.route('/dashboard')
def dashboard_data():
    return jsonify(AnalyticsService.get_dashboard_data())


@api_bp.route('/dsa')
def dsa_data():
    return jsonify(AnalyticsService.get_dsa_data())


@api_bp.route('/system-design')
def system_design_data():
    return jsonify(AnalyticsService.get_system_design_data())


@api_bp.route('/interviews')
def interview_data():
    return jsonify(AnalyticsService.get_interview_data())


@api_bp.route('/weak-areas')
def weak_area_data():
    return jsonify(AnalyticsService.get_weak_area_data())


@api_bp.route('/study')
def study_data():
    return jsonify(AnalyticsService.get_study_data())
