"""Sample dataset loaded into a fresh store at startup."""

from __future__ import annotations

import logging

from portal.domain.entities import (
    APPLICATION_STATUS_COMPLETED,
    APPLICATION_STATUS_PROCESSING,
    APPLICATION_STATUS_REVISION,
    NOTIFICATION_TYPE_ERROR,
    NOTIFICATION_TYPE_INFO,
    NOTIFICATION_TYPE_SUCCESS,
    Application,
    Notification,
    Service,
    ServiceCategory,
    User,
)
from portal.infrastructure.repositories import (
    ApplicationRepository,
    NotificationRepository,
    ServiceCategoryRepository,
    ServiceRepository,
    UserRepository,
)
from portal.infrastructure.security import get_password_hash
from portal.infrastructure.store import EntityStore

logger = logging.getLogger(__name__)

SAMPLE_DATA_MARKER = "sample_data"

SAMPLE_USER = {
    "username": "budisantoso",
    "password": "password123",
    "nik": "1234567890123456",
    "full_name": "Budi Santoso",
    "birth_place": "Jakarta",
    "birth_date": "1990-01-01",
    "gender": "L",
    "religion": "islam",
    "marital_status": "kawin",
    "address": "Jl. Merdeka No. 17, Jakarta",
    "phone": "081234567890",
    "email": "budi.santoso@email.com",
    "language": "id",
}

SAMPLE_CATEGORIES = (
    ("Kependudukan", "person"),
    ("Kesehatan", "local_hospital"),
    ("Pendidikan", "school"),
    ("Perizinan", "business"),
)

# name, description, category, icon, featured, popular
SAMPLE_SERVICES = (
    (
        "e-KTP",
        "Pengajuan dan perpanjangan kartu tanda penduduk elektronik",
        "Kependudukan",
        "assignment_ind",
        True,
        True,
    ),
    (
        "Kartu Keluarga",
        "Pengajuan dan perubahan kartu keluarga",
        "Kependudukan",
        "family_restroom",
        False,
        False,
    ),
    (
        "BPJS Kesehatan",
        "Pendaftaran, pembayaran, dan klaim asuransi kesehatan",
        "Kesehatan",
        "healing",
        True,
        False,
    ),
    (
        "Beasiswa",
        "Pendaftaran beasiswa pendidikan",
        "Pendidikan",
        "school",
        False,
        False,
    ),
    (
        "Perizinan Usaha",
        "Pengajuan izin usaha, SIUP, dan dokumen bisnis lainnya",
        "Perizinan",
        "business_center",
        True,
        False,
    ),
    (
        "Bantuan Sosial",
        "Pengajuan bantuan sosial dan subsidi",
        "Kependudukan",
        "attach_money",
        False,
        False,
    ),
    (
        "Layanan Disabilitas",
        "Layanan dan fasilitas untuk penyandang disabilitas",
        "Kesehatan",
        "accessibility_new",
        False,
        False,
    ),
)


def seed_sample_data(store: EntityStore) -> bool:
    """Populate ``store`` with the sample dataset.

    The steps run in dependency order: user, categories, services,
    applications, notifications. Returns ``False`` without touching the store
    when it has already been seeded.

    The store is marked before anything is inserted, so concurrent callers
    never load the data twice. A failed run is final: the records inserted so
    far stay in place and later calls return ``False``.
    """

    if not store.mark_initialized(SAMPLE_DATA_MARKER):
        logger.info("Sample data already loaded; skipping")
        return False

    try:
        _load_sample_data(store)
    except Exception:
        logger.exception("Loading sample data failed; the store is left partially seeded")
        raise
    return True


def _load_sample_data(store: EntityStore) -> None:
    user_data = dict(SAMPLE_USER)
    user_data["password"] = get_password_hash(user_data["password"])
    user = UserRepository(store).create(User(id=None, **user_data))

    category_repository = ServiceCategoryRepository(store)
    for name, icon in SAMPLE_CATEGORIES:
        category_repository.create(ServiceCategory(id=None, name=name, icon=icon))

    service_repository = ServiceRepository(store)
    services = [
        service_repository.create(
            Service(
                id=None,
                name=name,
                description=description,
                category=category,
                icon=icon,
                featured=featured,
                popular=popular,
            )
        )
        for name, description, category, icon, featured, popular in SAMPLE_SERVICES
    ]
    e_ktp, bpjs, business_permit = services[0], services[2], services[4]

    base_form = {"nik": user.nik, "name": user.full_name}
    application_repository = ApplicationRepository(store)
    for service, status, extra in (
        (e_ktp, APPLICATION_STATUS_PROCESSING, {}),
        (bpjs, APPLICATION_STATUS_COMPLETED, {}),
        (business_permit, APPLICATION_STATUS_REVISION, {"businessName": "Toko Budi"}),
    ):
        application_repository.create(
            Application(
                id=None,
                user_id=user.id,
                service_id=service.id,
                status=status,
                form_data={**base_form, **extra},
            )
        )

    notification_repository = NotificationRepository(store)
    for title, message, notification_type in (
        (
            "Permohonan e-KTP dalam proses",
            "Permohonan e-KTP Anda sedang diproses. Estimasi selesai dalam 5 hari kerja.",
            NOTIFICATION_TYPE_INFO,
        ),
        (
            "Pendaftaran BPJS selesai",
            "Pendaftaran BPJS Kesehatan Anda telah selesai. Kartu dapat diambil di kantor "
            "cabang terdekat.",
            NOTIFICATION_TYPE_SUCCESS,
        ),
        (
            "Revisi dokumen diperlukan",
            "Mohon periksa kembali dokumen perizinan usaha Anda. Beberapa dokumen perlu "
            "diperbaiki.",
            NOTIFICATION_TYPE_ERROR,
        ),
    ):
        notification_repository.create(
            Notification(
                id=None,
                user_id=user.id,
                title=title,
                message=message,
                type=notification_type,
            )
        )

    logger.info(
        "Loaded sample data: 1 user, %d categories, %d services, 3 applications, 3 notifications",
        len(SAMPLE_CATEGORIES),
        len(services),
    )


__all__ = ["SAMPLE_DATA_MARKER", "SAMPLE_USER", "seed_sample_data"]
