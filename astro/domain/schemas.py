"""
Request bodies accepted by the JSON API.

Every field is optional at this level: the services check required fields so
that the error messages stay the same no matter which field is missing. JSON
keys keep the names the web client already sends.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class SignupIn(_Body):
    phone: Optional[str] = None
    fullname: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = Field(default=None, alias="confirmPassword")


class LoginIn(_Body):
    phone: Optional[str] = None
    password: Optional[str] = None


class ChangePasswordIn(_Body):
    current_password: Optional[str] = Field(default=None, alias="currentPassword")
    new_password: Optional[str] = Field(default=None, alias="newPassword")


class ResetPasswordIn(_Body):
    phone: Optional[str] = None
    code: Optional[str] = None
    new_password: Optional[str] = Field(default=None, alias="newPassword")


class AstrologyResultIn(_Body):
    phone_number: Optional[str] = Field(default=None, alias="PhoneNumber")
    date: Optional[str] = None
    ascendant: Optional[str] = None
    chiron: Optional[str] = None
    jupiter: Optional[str] = None
    mars: Optional[str] = None
    mercury: Optional[str] = None
    moon: Optional[str] = None
    neptune: Optional[str] = None
    pluto: Optional[str] = None
    saturn: Optional[str] = None
    sun: Optional[str] = None
    venus: Optional[str] = None


class NumerologyNumbersIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    life_path_number: Optional[int] = Field(default=None, alias="lifePathNumber")
    destiny_number: Optional[int] = Field(default=None, alias="destinyNumber")
    soul_urge_number: Optional[int] = Field(default=None, alias="soulUrgeNumber")
    personality_number: Optional[int] = Field(default=None, alias="personalityNumber")
    natural_ability_number: Optional[int] = Field(default=None, alias="naturalAbilityNumber")
    maturity_number: Optional[int] = Field(default=None, alias="maturityNumber")
    attitude_number: Optional[int] = Field(default=None, alias="attitudeNumber")
    challenge1: Optional[int] = None
    challenge2: Optional[int] = None
    challenge3: Optional[int] = None
    challenge4: Optional[int] = None


class NumerologyCalculateIn(_Body):
    full_name: Optional[str] = Field(default=None, alias="fullName")
    date: Optional[str] = None
    numbers: Optional[NumerologyNumbersIn] = None
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")


class MeaningsIn(BaseModel):
    meanings: Optional[list[Optional[str]]] = None


class SystemIn(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


class UserIn(_Body):
    phone: Optional[str] = None
    fullname: Optional[str] = None
    password: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
