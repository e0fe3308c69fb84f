"""HotelBook - server-rendered hotel listings and reviews."""
