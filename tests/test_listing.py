"""Tests for public listing queries and the listings API."""

from estatehub.models.enums import ListingType, MediaType, UnitStatus
from estatehub.models.property import PropertyMedia
from estatehub.schemas.listing import PriceRange, ProjectFilters, RentResaleFilters
from estatehub.services import listing


class TestListingTypeResolution:
    """Listing types map onto property type names, ignoring case."""

    def test_rent_includes_aliases(self, test_db, property_types):
        ids = listing.resolve_listing_type_ids(test_db, ListingType.RENT)
        assert ids == sorted([property_types["Rent"].id, property_types["Rental"].id])

    def test_unknown_type_names_resolve_to_nothing(self, test_db):
        assert listing.resolve_listing_type_ids(test_db, ListingType.PROJECT) == []
        assert listing.fetch_projects_with_units(test_db) == []

    def test_properties_by_listing_type_newest_first(self, test_db, sample_listings):
        rentals = listing.fetch_properties_by_listing_type(test_db, "Rent")
        assert [p.id for p in rentals] == [sample_listings["legacy_rent"].id, sample_listings["rent"].id]

    def test_resolve_listing_type_falls_back_to_type_name(self, test_db, sample_listings):
        prop = listing.fetch_property_by_id(test_db, sample_listings["legacy_rent"].id)
        prop.listing_type = None
        assert listing.resolve_listing_type(prop) == ListingType.RENT

    def test_resolve_listing_type_prefers_column(self, test_db, sample_listings):
        prop = listing.fetch_property_by_id(test_db, sample_listings["resale"].id)
        assert listing.resolve_listing_type(prop) == ListingType.RESALE


class TestFilters:
    def test_project_status_returns_all_units(self, test_db, sample_listings):
        projects = listing.fetch_filtered_projects(
            test_db, ProjectFilters(project_status=UnitStatus.READY_TO_MOVE)
        )
        assert [p.id for p in projects] == [sample_listings["project"].id]
        # Matching projects keep every unit, not only the matching ones
        assert len(projects[0].units) == 2

    def test_project_price_filter_on_units(self, test_db, sample_listings):
        assert listing.fetch_filtered_projects(test_db, ProjectFilters(min_price=20_000_000)) == []
        projects = listing.fetch_filtered_projects(test_db, ProjectFilters(max_price=10_000_000))
        assert len(projects) == 1

    def test_non_positive_values_are_ignored(self, test_db, sample_listings):
        projects = listing.fetch_filtered_projects(test_db, ProjectFilters(min_price=0, max_price=-1))
        assert len(projects) == 1
        rentals = listing.fetch_filtered_rent(test_db, RentResaleFilters(min_price=-5, bedrooms=0))
        assert len(rentals) == 2

    def test_non_positive_project_prices_keep_unitless_projects(
        self, test_db, property_types, make_property, sample_listings
    ):
        launch = make_property(property_types["Project"], "Pre-launch Towers", "Pune", listing_type="Project")
        expected = [launch.id, sample_listings["project"].id]
        assert listing.has_project_filters(ProjectFilters(min_price=-1, max_price=0)) is False
        assert [p.id for p in listing.fetch_projects(test_db, ProjectFilters(min_price=-1))] == expected
        assert [p.id for p in listing.fetch_projects(test_db, ProjectFilters())] == expected

    def test_rent_bedrooms_filter(self, test_db, sample_listings):
        rentals = listing.fetch_filtered_rent(test_db, RentResaleFilters(bedrooms=1))
        assert [p.title for p in rentals] == ["Studio near Metro"]

    def test_resale_price_range(self, test_db, sample_listings):
        assert listing.fetch_filtered_resale(test_db, RentResaleFilters(max_price=1_000_000)) == []
        found = listing.fetch_filtered_resale(test_db, RentResaleFilters(min_price=50_000_000))
        assert [p.id for p in found] == [sample_listings["resale"].id]


class TestPriceRanges:
    def test_ranges_per_listing_type(self, test_db, sample_listings):
        ranges = listing.fetch_price_ranges(test_db)
        assert ranges.Project == PriceRange(min=9_500_000, max=15_000_000)
        assert ranges.Rent == PriceRange(min=20_000, max=45_000)
        assert ranges.Resale == PriceRange(min=52_000_000, max=52_000_000)

    def test_empty_ranges_are_zero(self, test_db):
        ranges = listing.fetch_price_ranges(test_db)
        assert ranges.Project.min == 0 and ranges.Project.max == 0
        assert ranges.Rent.max == 0

    def test_search_meta(self, test_db, sample_listings):
        meta = listing.fetch_search_meta(test_db)
        assert meta.cities == ["Bengaluru", "Mumbai", "Pune"]
        assert {t.name for t in meta.property_types} == {"Project", "Rent", "rental", "Resale"}


class TestSearch:
    def test_title_match(self, test_db, sample_listings):
        results = listing.search_properties(test_db, "sea facing")
        assert [p.id for p in results] == [sample_listings["resale"].id]

    def test_location_matches_are_merged_newest_first(self, test_db, sample_listings):
        results = listing.search_properties(test_db, "mumbai")
        assert [p.id for p in results] == [sample_listings["resale"].id, sample_listings["legacy_rent"].id]

    def test_blank_term(self, test_db, sample_listings):
        assert listing.search_properties(test_db, "   ") == []

    def test_like_wildcards_match_literally(self, test_db, sample_listings):
        assert listing.search_properties(test_db, "%") == []
        assert listing.search_properties(test_db, "_") == []

    def test_escape_like_pattern(self):
        assert listing.escape_like_pattern("50%_off\\") == "50\\%\\_off\\\\"

    def test_limit(self, test_db, sample_listings):
        assert len(listing.search_properties(test_db, "a", limit=2)) == 2

    def test_city_exact_match_ignores_case(self, test_db, sample_listings):
        results = listing.search_properties_by_city(test_db, " MUMBAI ")
        assert len(results) == 2
        assert listing.search_properties_by_city(test_db, "Mum") == []

    def test_fallback_returns_text_results_first(self, test_db, sample_listings):
        results = listing.search_with_city_fallback(test_db, "Pune")
        assert [p.id for p in results] == [sample_listings["project"].id]

    def test_suggestions_are_capped(self, test_db, sample_listings):
        assert len(listing.suggest_properties(test_db, "a")) <= 5


class TestFeaturedVideos:
    def test_only_featured_videos(self, test_db, sample_listings):
        prop_id = sample_listings["resale"].id
        test_db.add_all(
            [
                PropertyMedia(property_id=prop_id, file_url="/media/videos/a.mp4",
                              media_type=MediaType.VIDEO.value, is_featured=True),
                PropertyMedia(property_id=prop_id, file_url="/media/videos/b.mp4",
                              media_type=MediaType.VIDEO.value, is_featured=False),
                PropertyMedia(property_id=prop_id, file_url="/media/properties/c.jpg",
                              media_type=MediaType.IMAGE.value, is_featured=True),
            ]
        )
        test_db.commit()
        videos = listing.fetch_featured_videos(test_db)
        assert [v.file_url for v in videos] == ["/media/videos/a.mp4"]


class TestPaginate:
    def test_slices_and_clamps(self):
        items = list(range(30))
        page_items, page, total = listing.paginate(items, 3, page_size=12)
        assert page_items == list(range(24, 30))
        assert (page, total) == (3, 3)
        assert listing.paginate(items, 99, page_size=12)[1] == 3
        assert listing.paginate([], 0, page_size=12) == ([], 1, 1)


class TestListingsAPI:
    def test_projects_with_units(self, client, sample_listings):
        response = client.get("/api/listings/projects")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert len(data[0]["units"]) == 2

    def test_projects_ignore_negative_price(self, client, property_types, make_property, sample_listings):
        make_property(property_types["Project"], "Pre-launch Towers", "Pune", listing_type="Project")
        plain = client.get("/api/listings/projects").json()
        negative = client.get("/api/listings/projects", params={"min_price": -1}).json()
        assert len(plain) == 2
        assert [p["id"] for p in negative] == [p["id"] for p in plain]

    def test_projects_status_filter(self, client, sample_listings):
        response = client.get("/api/listings/projects", params={"project_status": "sold"})
        assert response.json() == []

    def test_rent_filter(self, client, sample_listings):
        response = client.get("/api/listings/rent", params={"bedrooms": 2})
        assert [p["title"] for p in response.json()] == ["Furnished 2 BHK"]

    def test_by_listing_type(self, client, sample_listings):
        response = client.get("/api/listings/type/Resale")
        assert [p["id"] for p in response.json()] == [sample_listings["resale"].id]

    def test_detail_and_missing(self, client, sample_listings):
        response = client.get(f"/api/listings/{sample_listings['project'].id}")
        assert response.status_code == 200
        assert response.json()["location"]["city"] == "Pune"
        assert client.get("/api/listings/9999").status_code == 404

    def test_similar(self, client, sample_listings):
        response = client.get(f"/api/listings/{sample_listings['rent'].id}/similar")
        assert [p["id"] for p in response.json()] == [sample_listings["legacy_rent"].id]

    def test_search(self, client, sample_listings):
        response = client.get("/api/listings/search", params={"q": "Skyline"})
        assert [p["title"] for p in response.json()] == ["Skyline Residences"]

    def test_price_ranges_and_meta(self, client, sample_listings):
        ranges = client.get("/api/listings/price-ranges").json()
        assert ranges["Rent"] == {"min": 20_000, "max": 45_000}
        meta = client.get("/api/listings/search-meta").json()
        assert "Pune" in meta["cities"]

    def test_suggestions(self, client, sample_listings):
        response = client.get("/api/listings/suggestions", params={"q": "BHK"})
        assert {p["title"] for p in response.json()} == {"Furnished 2 BHK", "Sea Facing 3 BHK"}
