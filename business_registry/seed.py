"""
Example businesses written to the registry on first start
"""
from typing import List

from business_registry.models.business import BusinessRecord


SAMPLE_BUSINESSES = [
    {
        "id": "1",
        "name": "Tech Innovations Pvt Ltd",
        "udyamNumber": "UDYAM-MH-03-1234567",
        "category": "Technology",
        "status": "Active",
        "registrationDate": "2023-01-15",
        "location": "Mumbai, Maharashtra",
        "employees": 25,
        "ownerName": "Rajesh Kumar",
        "email": "rajesh@techinnovations.com",
        "phone": "+91-9876543210",
        "address": "123 Tech Park, Powai",
        "city": "Mumbai",
        "state": "Maharashtra",
        "pincode": "400076",
        "website": "https://techinnovations.com",
        "description": "Leading technology solutions provider specializing in AI and ML",
    },
    {
        "id": "2",
        "name": "Green Energy Solutions",
        "udyamNumber": "UDYAM-KA-07-2345678",
        "category": "Energy",
        "status": "Active",
        "registrationDate": "2023-02-20",
        "location": "Bangalore, Karnataka",
        "employees": 18,
        "ownerName": "Priya Sharma",
        "email": "priya@greenenergy.com",
        "phone": "+91-9876543211",
        "address": "456 Green Valley, Electronic City",
        "city": "Bangalore",
        "state": "Karnataka",
        "pincode": "560100",
        "website": "https://greenenergy.com",
        "description": "Sustainable energy solutions for commercial and residential use",
    },
    {
        "id": "3",
        "name": "Artisan Crafts Co.",
        "udyamNumber": "UDYAM-RJ-02-3456789",
        "category": "Handicrafts",
        "status": "Pending",
        "registrationDate": "2023-03-10",
        "location": "Jaipur, Rajasthan",
        "employees": 12,
        "ownerName": "Meera Agarwal",
        "email": "meera@artisancrafts.com",
        "phone": "+91-9876543212",
        "address": "789 Heritage Lane, Pink City",
        "city": "Jaipur",
        "state": "Rajasthan",
        "pincode": "302001",
        "description": "Traditional Rajasthani handicrafts and textiles",
    },
    {
        "id": "4",
        "name": "Fresh Farm Produce",
        "udyamNumber": "UDYAM-PB-04-4567890",
        "category": "Agriculture",
        "status": "Active",
        "registrationDate": "2023-02-28",
        "location": "Ludhiana, Punjab",
        "employees": 30,
        "ownerName": "Harpreet Singh",
        "email": "harpreet@freshfarm.com",
        "phone": "+91-9876543213",
        "address": "321 Farm Road, Ludhiana",
        "city": "Ludhiana",
        "state": "Punjab",
        "pincode": "141001",
        "description": "Organic farming and fresh produce distribution",
    },
    {
        "id": "5",
        "name": "Digital Marketing Hub",
        "udyamNumber": "UDYAM-DL-01-5678901",
        "category": "Services",
        "status": "Active",
        "registrationDate": "2023-03-05",
        "location": "New Delhi",
        "employees": 8,
        "ownerName": "Amit Verma",
        "email": "amit@digitalmarketing.com",
        "phone": "+91-9876543214",
        "address": "654 Business Center, Connaught Place",
        "city": "New Delhi",
        "state": "Delhi",
        "pincode": "110001",
        "website": "https://digitalmarketinghub.com",
        "description": "Comprehensive digital marketing services for small and medium businesses",
    },
    {
        "id": "6",
        "name": "Textile Manufacturing Co.",
        "udyamNumber": "UDYAM-GJ-05-6789012",
        "category": "Textiles",
        "status": "Pending",
        "registrationDate": "2023-03-12",
        "location": "Surat, Gujarat",
        "employees": 45,
        "ownerName": "Ravi Patel",
        "email": "ravi@textilemanufacturing.com",
        "phone": "+91-9876543215",
        "address": "987 Textile District, Surat",
        "city": "Surat",
        "state": "Gujarat",
        "pincode": "395003",
        "description": "High-quality textile manufacturing for domestic and export markets",
    },
]


def sample_businesses() -> List[BusinessRecord]:
    """Fresh copies of the example set"""
    return [BusinessRecord.model_validate(item) for item in SAMPLE_BUSINESSES]
