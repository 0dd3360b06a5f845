import logging
from flask import render_template, request, redirect, url_for, flash, jsonify, current_app, send_from_directory
from models import Candidate, CandidateStatus, REQUIRED_FIELDS
from store import CandidateStore
from uploads import UploadRejected, save_resume, has_file, public_url
from utils import (
    missing_fields, validate_referral, filter_candidates,
    EMAIL_PATTERN, PHONE_PATTERN,
)

logger = logging.getLogger(__name__)

STORE_EXTENSION = 'candidate_store'


def get_store() -> CandidateStore:
    return current_app.extensions[STORE_EXTENSION]


def create_candidate(data, resume=None) -> Candidate:
    """Save the resume (if any), then append a new Pending candidate.

    Raises UploadRejected for a non-PDF resume; store errors propagate.
    """
    resume_url = None
    if resume is not None:
        stored_name = save_resume(resume, current_app.config['UPLOAD_FOLDER'])
        resume_url = public_url(stored_name)

    candidate = Candidate.create(
        name=data['name'],
        email=data['email'],
        phone=data['phone'],
        jobTitle=data['jobTitle'],
        resume_url=resume_url
    )
    get_store().append(candidate)
    logger.info(f"Candidate {candidate.id} referred for {candidate.jobTitle!r}")
    return candidate


def render_dashboard(candidates, search='', form=None, error=None, status_code=200):
    return render_template(
        'index.html',
        candidates=candidates,
        statuses=CandidateStatus,
        search=search,
        form=form or {},
        error=error,
        api_base=current_app.config['API_BASE'],
        email_pattern=EMAIL_PATTERN,
        phone_pattern=PHONE_PATTERN
    ), status_code


def _dashboard_with_error(form, error, status_code):
    # Re-render with the entered values kept
    try:
        candidates = get_store().load()
    except Exception:
        logger.exception("Failed to read candidate store")
        candidates = []
    return render_dashboard(candidates, form=form, error=error, status_code=status_code)


def register_routes(app):
    @app.route('/')
    def index():
        search = request.args.get('search', '')
        try:
            candidates = get_store().load()
        except Exception:
            logger.exception("Failed to read candidate store")
            return render_dashboard([], search, error='Could not load candidates. Check backend.')
        return render_dashboard(filter_candidates(candidates, search), search)

    @app.route('/refer', methods=['POST'])
    def refer_candidate():
        """Dashboard form submission for browsers without JavaScript"""
        form = {name: request.form.get(name, '') for name in REQUIRED_FIELDS}
        resume = request.files.get('resume')
        if not has_file(resume):
            resume = None

        error = validate_referral(
            form,
            resume.filename if resume else None,
            resume.mimetype if resume else None
        )
        if error:
            logger.warning(f"Referral form rejected: {error}")
            return _dashboard_with_error(form, error, 400)

        try:
            create_candidate(form, resume)
        except UploadRejected as e:
            return _dashboard_with_error(form, str(e), 400)
        except Exception:
            logger.exception("Failed to add candidate from dashboard form")
            return _dashboard_with_error(form, 'Server error while referring candidate.', 500)

        flash('Candidate referred successfully!', 'success')
        return redirect(url_for('index'))

    @app.route('/candidates/<candidate_id>/status', methods=['POST'])
    def update_candidate_status_form(candidate_id):
        """Status change from the dashboard select when JavaScript is off"""
        new_status = request.form.get('status')

        if new_status not in [status.value for status in CandidateStatus]:
            flash('Invalid status', 'error')
            return redirect(url_for('index'))

        try:
            candidate = get_store().update_status(candidate_id, new_status)
        except Exception:
            logger.exception(f"Failed to update status of candidate {candidate_id}")
            flash('Could not update status.', 'error')
            return redirect(url_for('index'))

        if candidate is None:
            flash('Candidate not found.', 'error')
        else:
            flash('Status updated.', 'success')
        return redirect(url_for('index'))

    # API endpoints
    @app.route('/candidates', methods=['GET'])
    def api_candidates():
        """Full contents of the store, in creation order"""
        try:
            candidates = get_store().load()
        except Exception:
            logger.exception("Failed to read candidate store")
            return jsonify({'error': 'Failed to read database.'}), 500
        return jsonify([c.to_dict() for c in candidates])

    @app.route('/candidates', methods=['POST'])
    def api_create_candidate():
        """Create a candidate from multipart form data with an optional resume"""
        resumes = [f for f in request.files.getlist('resume') if has_file(f)]
        if len(resumes) > 1:
            return jsonify({'error': 'Only one resume file may be uploaded.'}), 400
        resume = resumes[0] if resumes else None

        if request.form:
            data = request.form.to_dict()
        else:
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                data = {}

        missing = missing_fields(data)
        if missing:
            logger.warning(f"Referral rejected, missing fields: {', '.join(missing)}")
            return jsonify({'error': 'All fields are required.'}), 400

        try:
            candidate = create_candidate(data, resume)
        except UploadRejected as e:
            return jsonify({'error': str(e)}), 400
        except Exception:
            logger.exception("Failed to add candidate")
            return jsonify({'error': 'Failed to add candidate.'}), 500

        return jsonify(candidate.to_dict())

    @app.route('/candidates/<candidate_id>/status', methods=['PUT'])
    def api_update_candidate_status(candidate_id):
        """Overwrite a candidate's status with whatever value the body carries"""
        payload = request.get_json(silent=True)
        new_status = payload.get('status') if isinstance(payload, dict) else None

        try:
            candidate = get_store().update_status(candidate_id, new_status)
        except Exception:
            logger.exception(f"Failed to update status of candidate {candidate_id}")
            return jsonify({'error': 'Failed to update status.'}), 500

        if candidate is None:
            return jsonify({'error': 'Candidate not found.'}), 404

        logger.info(f"Candidate {candidate_id} status set to {new_status!r}")
        return jsonify(candidate.to_dict())

    @app.route('/uploads/<path:filename>')
    def uploaded_file(filename):
        return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'error': 'Not found.'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'error': 'Method not allowed.'}), 405

    @app.errorhandler(413)
    def file_too_large(e):
        limit_mb = current_app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024)
        return jsonify({'error': f'Upload too large (max {limit_mb}MB).'}), 413

    @app.errorhandler(500)
    def internal_error(e):
        # Flask has already logged the traceback of the unhandled exception
        return jsonify({'error': 'Internal server error.'}), 500
