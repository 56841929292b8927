"""
Unit tests for years-of-experience estimation.
"""

from datetime import datetime

from resume_extraction.parser.experience import estimate_years, merge_date_ranges
from resume_extraction.parser.models import DateRange


YEAR = 2025


class TestDirectPhrases:

    def test_plus_years_of_experience(self):
        assert estimate_years("5+ years of experience in backend development", YEAR) == 5

    def test_experience_label(self):
        assert estimate_years("Experience: 7 years in fintech", YEAR) == 7

    def test_years_in_the_field(self):
        assert estimate_years("Over 4 years in the field of data", YEAR) == 4

    def test_years_of_work(self):
        assert estimate_years("6 years of work at startups", YEAR) == 6

    def test_fraction_rounds_half_up(self):
        assert estimate_years("2.5 years experience", YEAR) == 3

    def test_upper_bound_accepted(self):
        assert estimate_years("50 years of experience", YEAR) == 50

    def test_out_of_range_rejected(self):
        assert estimate_years("60 years of experience", YEAR) == 0

    def test_phrase_beats_date_ranges(self):
        text = "3 years of experience\nExperience\nAcme 2010 - 2020"
        assert estimate_years(text, YEAR) == 3


class TestDateRanges:

    def test_disjoint_ranges_summed(self):
        assert estimate_years("Worked 2015-2018 and 2019-present", YEAR) == (2018 - 2015) + (YEAR - 2019)

    def test_overlapping_ranges_merged(self):
        assert estimate_years("2015-2020, 2018-present", YEAR) == YEAR - 2015

    def test_adjacent_ranges_merged(self):
        assert estimate_years("Acme 2015-2018\nGlobex 2018-2020", YEAR) == 5

    def test_to_separator_and_en_dash(self):
        assert estimate_years("Acme 2018 to 2021", YEAR) == 3
        assert estimate_years("Acme 2018 – 2021", YEAR) == 3

    def test_now_and_current(self):
        assert estimate_years("Acme 2020 - now", YEAR) == YEAR - 2020
        assert estimate_years("Acme 2021 - Current", YEAR) == YEAR - 2021

    def test_restricted_to_experience_section(self):
        text = (
            "Experience\n"
            "Acme Corp 2018 - 2021\n"
            "Education\n"
            "BSc 2014 - 2018\n"
        )
        assert estimate_years(text, YEAR) == 3

    def test_implausible_ranges_discarded(self):
        assert estimate_years("Acme 1985 - 1992", YEAR) == 0
        assert estimate_years("Acme 2020 - 2030", YEAR) == 0
        assert estimate_years("Acme 2019 - 2017", YEAR) == 0

    def test_empty_experience_section_does_not_scan_whole_document(self):
        text = "Experience\n\nEducation\nBSc 2014 - 2018"
        assert estimate_years(text, YEAR) == 0

    def test_header_as_last_line_counts_nothing(self):
        text = "Acme 2018 - 2021\nExperience"
        assert estimate_years(text, YEAR) == 0

    def test_zero_length_range_falls_through(self):
        assert estimate_years("Acme 2019 - 2019", YEAR) == 0

    def test_defaults_to_current_calendar_year(self):
        assert estimate_years("Acme 2019 - present") == datetime.now().year - 2019


class TestKeywordFallback:

    def test_fresher(self):
        assert estimate_years("Fresher seeking an internship", YEAR) == 0

    def test_fresh_graduate(self):
        # fresh graduate outranks the internship hint
        assert estimate_years("Fresh graduate, completed an internship at Acme", YEAR) == 0

    def test_student_without_experience(self):
        assert estimate_years("Final year student at IIT", YEAR) == 0

    def test_student_with_internship_experience(self):
        assert estimate_years("Student with internship experience", YEAR) == 1

    def test_internship(self):
        assert estimate_years("Completed a summer internship at Acme", YEAR) == 1

    def test_no_signal(self):
        assert estimate_years("Enjoys hiking and chess", YEAR) == 0

    def test_empty(self):
        assert estimate_years("", YEAR) == 0


class TestMergeDateRanges:

    def test_merge_sorts_and_combines(self):
        ranges = [DateRange(2018, 2020), DateRange(2010, 2012), DateRange(2011, 2015)]
        assert merge_date_ranges(ranges) == [DateRange(2010, 2015), DateRange(2018, 2020)]

    def test_contained_range(self):
        assert merge_date_ranges([DateRange(2010, 2020), DateRange(2012, 2014)]) == [DateRange(2010, 2020)]

    def test_empty(self):
        assert merge_date_ranges([]) == []
