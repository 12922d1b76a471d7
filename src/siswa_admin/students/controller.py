from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.validators import errors_by_field
from ..container import Container
from ..core.constants import (
    DEFAULT_DISPLAY_NAME,
    NAMA_MAX_LENGTH,
    ROMBEL_MAX_LENGTH,
    TERDAFTAR_CHOICES,
    TINGKAT_CHOICES,
)
from ..core.exceptions import FormValidationError, NotFoundError
from ..users.guards import login_required
from . import messages


def register(app: Flask, container: Container) -> None:
    students = container.student_service

    def render_form(template: str, *, title: str, siswa, errors=None, status: int = 200):
        errors = errors or []
        return (
            render_template(
                template,
                title=title,
                siswa=siswa,
                errors=errors,
                field_errors=errors_by_field(errors),
                batas=students.cutoff.isoformat(),
                tingkat_choices=TINGKAT_CHOICES,
                terdaftar_choices=TERDAFTAR_CHOICES,
                nama_max=NAMA_MAX_LENGTH,
                rombel_max=ROMBEL_MAX_LENGTH,
            ),
            status,
        )

    def render_not_found(message: str):
        return render_template("not_found.html", title="Tidak Ditemukan", message=message), 404

    @app.route("/", endpoint="home")
    @login_required
    def home():
        return render_template(
            "home.html",
            title="Home",
            siswas=students.list_students(),
            nama=session.get("username") or DEFAULT_DISPLAY_NAME,
        )

    @app.route("/about", endpoint="about")
    def about():
        return render_template("about.html", title="About")

    @app.route("/data-siswa", methods=["GET"], endpoint="data_siswa")
    @login_required
    def data_siswa():
        return render_template("data_siswa.html", title="Data Siswa", siswas=students.list_students())

    @app.route("/data-siswa/add", methods=["GET"], endpoint="add_siswa")
    @login_required
    def add_siswa():
        return render_form("add_siswa.html", title="Tambah Siswa", siswa={})

    @app.route("/data-siswa", methods=["POST"], endpoint="create_siswa")
    @login_required
    def create_siswa():
        try:
            students.create_student(request.form)
        except FormValidationError as e:
            return render_form("add_siswa.html", title="Tambah Siswa", siswa=request.form, errors=e.errors)

        flash(messages.CREATED, "success")
        return redirect(url_for("data_siswa"))

    @app.route("/data-siswa", methods=["DELETE"], endpoint="delete_siswa")
    @login_required
    def delete_siswa():
        students.delete_student(request.form.get("nisn", ""))
        flash(messages.DELETED, "success")
        return redirect(url_for("data_siswa"))

    @app.route("/data-siswa/edit/<nisn>", methods=["GET"], endpoint="edit_siswa")
    @login_required
    def edit_siswa(nisn: str):
        try:
            student = students.get_by_nisn(nisn)
        except NotFoundError as e:
            return render_not_found(str(e))
        return render_form("edit_siswa.html", title="Edit Siswa", siswa=student.as_form())

    @app.route("/data-siswa", methods=["PUT"], endpoint="update_siswa")
    @login_required
    def update_siswa():
        try:
            students.update_student(request.form)
        except FormValidationError as e:
            try:
                stored = students.get_by_nisn(request.form.get("nisn", "")).as_form()
            except NotFoundError as nf:
                return render_not_found(str(nf))
            # nik/nisn/nama always come from the stored record
            editable = {k: request.form.get(k, "") for k in ("tingkat", "rombel", "tgl_masuk", "terdaftar")}
            return render_form("edit_siswa.html", title="Edit Siswa", siswa={**stored, **editable}, errors=e.errors)
        except NotFoundError as e:
            return render_not_found(str(e))

        flash(messages.UPDATED, "success")
        return redirect(url_for("data_siswa"))
