"""
Common test fixtures and configuration.
"""
import pytest

from komparisi.models import KtpData


@pytest.fixture
def ktp_male():
    return KtpData(
        nik="3171012345670001",
        nama="budi santoso",
        gelarDepanExpanded="Haji",
        gelarBelakangExpanded="sarjana hukum",
        tempatLahir="JAKARTA",
        tanggalLahir="17-08-1945",
        jenisKelamin="LAKI-LAKI",
        alamat="Jalan Merdeka Nomor 10",
        rt="5",
        rw="12",
        kelDesa="GAMBIR",
        kecamatan="GAMBIR",
        kota="JAKARTA PUSAT",
        statusPerkawinan="KAWIN",
        pekerjaan="PEGAWAI SWASTA",
        kewarganegaraan="WNI",
    )


@pytest.fixture
def ktp_female():
    return KtpData(
        nik="3273014506900002",
        nama="Siti Aminah",
        gelarDepanExpanded="Haji",
        tempatLahir="bandung",
        tanggalLahir="05-06-2001",
        jenisKelamin="PEREMPUAN",
        alamat="Gang Mawar Nomor 3",
        rt="001",
        rw="002",
        kelDesa="CIHAPIT",
        kecamatan="BANDUNG WETAN",
        kota="KOTA BANDUNG",
        statusPerkawinan="BELUM KAWIN",
        pekerjaan="MAHASISWA",
        kewarganegaraan="wni ",
    )
