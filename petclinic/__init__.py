"""PetClinic 서버 패키지.

PetClinic server package — holders, pets and visits record keeping.
"""
