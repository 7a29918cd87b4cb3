"""
Field definitions for the employee profile edit forms.

Each section (summary, job, personal) is an ordered list of fields. The
element id rendered for a field is ``employee_<name>`` unless the field
overrides it, matching the markup of the hosted application.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfileField:
    name: str
    label: str
    kind: str = "text"  # text, select or checkbox
    options: tuple[str, ...] = ()
    required: bool = False
    element_id: str | None = None

    @property
    def dom_id(self) -> str:
        return self.element_id or f"employee_{self.name}"


LOCATIONS = ("London Office", "Manchester Office", "Remote")

SECTIONS: dict[str, tuple[ProfileField, ...]] = {
    "summary": (
        ProfileField("person_type", "Person type", "select", ("Employee", "Contractor", "Director")),
        ProfileField("title", "Title", "select", ("Mr", "Mrs", "Miss", "Ms", "Dr")),
        ProfileField("first_name", "First name", required=True),
        ProfileField("middle_name", "Middle name"),
        ProfileField("last_name", "Last name", required=True),
        ProfileField("pronouns", "Pronouns", "select", ("He/Him", "She/Her", "They/Them")),
        ProfileField("known_as", "Known as"),
        ProfileField("reference", "Ref"),
        ProfileField("ddi", "DDI"),
        ProfileField("work_ext", "Work ext"),
        ProfileField("work_mobile", "Work mobile"),
        ProfileField("skype_username", "Skype"),
        ProfileField("linkedin_username", "LinkedIn"),
        ProfileField("twitter_username", "Twitter"),
        ProfileField("facebook_username", "Facebook"),
    ),
    "job": (
        ProfileField("is_director", "Is a director?", "checkbox"),
        ProfileField(
            "company_division_id", "Division", "select",
            ("Human Resources", "Operations", "Technology"),
        ),
        ProfileField(
            "company_department_id", "Department", "select",
            ("PlayWright Automation", "Engineering", "Finance"),
        ),
        ProfileField("company_location_id", "Company location", "select", LOCATIONS),
        ProfileField("employee_location_id", "Person location", "select", LOCATIONS),
        ProfileField("provider", "Provider", required=True),
        ProfileField(
            "company_contracttype_id", "Type", "select",
            ("Permanent", "Fixed Term", "Contractor"),
        ),
        ProfileField("probation_date", "Probation date"),
        ProfileField("probation_date_reminder", "Probation reminder"),
        ProfileField(
            "company_noticeperiod_id", "Notice period", "select",
            ("1 Week", "1 Month", "3 Months"),
        ),
        ProfileField(
            "remuneration_currency_id", "Payment currency", "select",
            ("GBP - British Pound Sterling", "EUR - Euro", "USD - US Dollar"),
        ),
        # The hosted app renders this id with a literal leading hash
        ProfileField("join_date", "Join date", element_id="#employee_join_date_react"),
    ),
    "personal": (
        ProfileField("gender", "Gender", "select", ("Male", "Female", "Non-binary", "Prefer not to say")),
        ProfileField("dob", "Date of birth"),
        ProfileField("nationality", "Nationality", "select", ("British", "Irish", "French", "American")),
        ProfileField("marital_status", "Marital status", "select", ("Single", "Married", "Divorced", "Widowed")),
        ProfileField("national_insurance_number", "National insurance number"),
        ProfileField("driving_licence_number", "Driving licence number"),
        ProfileField("personal_email", "Personal email"),
        ProfileField("personal_mobile", "Personal mobile"),
        ProfileField("home_telephone", "Home telephone"),
        ProfileField("address_address_1", "Address 1"),
        ProfileField("address_address_2", "Address 2"),
        ProfileField("address_address_3", "Address 3"),
        ProfileField("address_city", "City"),
        ProfileField("address_post_code", "Post code"),
        ProfileField("address_county", "County"),
        ProfileField("address_country", "Country"),
        ProfileField(
            "ethnicity", "Ethnicity", "select",
            ("White British", "Mixed", "Asian British", "Black British", "Other"),
        ),
    ),
}


def validate_section(section: str, form: dict) -> dict[str, str]:
    """Return field name -> error message for missing required fields."""
    errors = {}
    for field in SECTIONS[section]:
        if field.required and not str(form.get(field.name, "")).strip():
            errors[field.name] = f"{field.label} can't be blank"
    return errors
