"""
Admin Contact Routes
"""

from flask import flash, redirect, render_template, request, url_for
from vawmy.admin import admin_bp
from vawmy.admin.decorators import admin_required
from vawmy.exceptions import ApiError
from vawmy.extensions import api
from vawmy.models import ContactInfo


@admin_bp.route('/contact', methods=['GET', 'POST'])
@admin_required
def manage_contact():
    """Singleton contact form, saved as a full-record update."""
    if request.method == 'POST':
        contact = ContactInfo(email=request.form.get('email', '').strip(),
                              phone=request.form.get('phone', '').strip(),
                              address=request.form.get('address', '').strip(),
                              hours=request.form.get('hours', '').strip())
        try:
            api.update_contact(contact.to_payload())
        except ApiError as e:
            flash(f'Error updating contact information: {e.message}', 'danger')
            return render_template('admin/contact.html', form=contact)

        flash('Contact information updated successfully!', 'success')
        return redirect(url_for('admin.manage_contact'))

    try:
        contact = ContactInfo.from_dict(api.get_contact())
    except ApiError as e:
        flash(e.message, 'danger')
        contact = ContactInfo()
    return render_template('admin/contact.html', form=contact)
